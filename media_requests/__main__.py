"""Run the API with uvicorn: ``python -m media_requests``."""
import uvicorn

from media_requests.config import settings


def main():
    uvicorn.run("media_requests.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
