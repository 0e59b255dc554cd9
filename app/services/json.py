from fastapi.responses import JSONResponse
from fastapi import status

def return_json(message: str = "Success", code: int = status.HTTP_200_OK):
    return JSONResponse(
        status_code=code,
        content={"success": True, "message": message}
    )

def return_error_json(message: str = "Error", code: int = status.HTTP_400_BAD_REQUEST):
    return JSONResponse(
        status_code=code,
        content={"success": False, "message": message}
    )
