from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"
    # Key the detail is sent under in the JSON body
    body_key: str = "message"

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)

    def to_content(self) -> dict[str, str]:
        return {self.body_key: self.detail}
