import logging

import uvicorn

from quote_frontend.main import app


def main() -> None:
    settings = app.state.settings
    logging.getLogger("frontend").info(
        "Frontend version %s is listening now at port %s",
        settings.app_version,
        settings.port,
    )
    # log_config=None keeps the JSON handler installed by init_logging
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
