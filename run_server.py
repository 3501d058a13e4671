#!/usr/bin/env python3
"""
Simple script to run the server
Just run: python3 run_server.py
"""
import logging

if __name__ == "__main__":
    import uvicorn
    from classcode.core import config
    from classcode.main import app, configure_logging

    configure_logging()
    logger = logging.getLogger("run_server")

    logger.info("=" * 50)
    logger.info("Starting Classroom Question Codes server...")
    logger.info(f"Server will be available at: http://localhost:{config.PORT}")
    logger.info(f"API docs available at: http://localhost:{config.PORT}/docs")
    logger.info("Press CTRL+C to stop the server")
    logger.info("=" * 50)

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
