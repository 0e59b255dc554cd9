from app.routes.health.router import health_router as health
from app.routes.review.router import review_router as review
from app.routes.frontend.router import frontend_router as frontend


def get_all_routers():
    return [
        health,
        review,
        frontend
    ]
