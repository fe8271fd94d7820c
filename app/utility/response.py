from fastapi import status


def api_response(data, message: str = "Success", status_code: int = status.HTTP_200_OK) -> dict:
    return {
        "statusCode": status_code,
        "data": data,
        "message": message,
        "success": status_code < 400,
    }


def error_response(status_code: int, message: str, code: str, errors: list | None = None) -> dict:
    return {
        "statusCode": status_code,
        "data": None,
        "message": message,
        "success": False,
        "errors": errors or [],
        "code": code,
    }
