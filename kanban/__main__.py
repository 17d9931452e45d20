# kanban/__main__.py
import uvicorn

from kanban.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("kanban.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
