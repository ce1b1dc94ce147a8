import os

import uvicorn

from savings_prioritizer.app import app
from savings_prioritizer.core import settings
from savings_prioritizer.logger import get_logging_config


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = settings.get_env_int("PORT", 8000, min_value=1)
    uvicorn.run(app, host=host, port=port, log_config=get_logging_config())


if __name__ == "__main__":
    main()
