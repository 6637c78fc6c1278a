#!/usr/bin/env python

import uvicorn
from fastapi import FastAPI

from ping_service import api, config

app = FastAPI(
    title=config.application.name,
    version=config.application.version,
    debug=config.application.debug,
    docs_url=config.application.docs_url,
    root_path=config.application.root_path,
)
app.include_router(api.router)


def main() -> None:
    uvicorn.run(app, host=config.web.host, port=config.web.port, log_config=config.LOGGING, access_log=True)


if __name__ == "__main__":
    main()
