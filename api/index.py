import logging
from movieshelf.main import app

# Setup basic logging to capture errors in Vercel Logs
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

logger.info("Movie Shelf api/index.py initialized")

# Vercel Serverless Functions entry point, exports the FastAPI app instance
