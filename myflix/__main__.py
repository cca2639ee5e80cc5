"""Run the API with uvicorn: python -m myflix"""
import uvicorn

from myflix.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("myflix.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
