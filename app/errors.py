from typing import Optional

class AppError(Exception):
    status_code: int = 400
    code: str = "APP_ERROR"

    def __init__(self, message: str, *, code: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code
        self.message = message

class UnknownFilterKey(AppError):
    code = "UNKNOWN_FILTER_KEY"
    status_code = 400

    def __init__(self, key: str):
        super().__init__(f"Clave de filtro desconocida: {key!r}")
        self.key = key

class InvalidQuickSelection(AppError):
    code = "INVALID_QUICK_SELECTION"
    status_code = 400
