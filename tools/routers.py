from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles


def gather_routers(app: FastAPI, routers: list) -> FastAPI:
    [app.include_router(router) for router in routers]
    return app


def mount_public(app: FastAPI, directory: str) -> FastAPI:
    # Mounted last so API routes win over files of the same name
    app.mount("/", StaticFiles(directory=directory, check_dir=False), name="public")
    return app
