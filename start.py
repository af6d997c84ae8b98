# start.py
import logging
import os

import uvicorn

from portfolio_api.core.config import settings

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    port = int(os.environ.get("PORT", "8000"))
    logger.info(f"🚀 Starting Uvicorn server on :{port} (Reload={settings.debug})...")
    uvicorn.run(
        "portfolio_api.main:app",
        host="0.0.0.0",
        port=port,
        reload=settings.debug,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
