# run.py

import uvicorn
from agent_parser.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "agent_parser.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )
