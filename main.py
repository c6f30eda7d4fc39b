# main.py
import uvicorn

from navmap.config import HOST, PORT
from navmap.main import app, setup_logging


def run() -> None:
    setup_logging()
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
