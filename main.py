"""
Lunar Calendar Clock Main Application

This is the entry point for the lunar calendar clock service.
It wires together the renderer, the output managers and the API routes.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from api.routes_clock import setup_clock_routes
from config import CLOCK_FPS, CLOCK_STYLE_PATH, DEFAULT_PORT, PRODUCTION_PORT
from lunar_calendar.config import load_style
from lunar_calendar.renderer import LunarCalendarRenderer
from managers.clock_manager import ClockDisplayManager
from managers.framebuffer_manager import FramebufferManager

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Overridden by --no-framebuffer
USE_FRAMEBUFFER = os.getenv("CLOCK_FRAMEBUFFER", "1") != "0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan management for FastAPI application.
    Handles startup and shutdown tasks.
    """
    framebuffer_manager = None

    # STARTUP
    logging.info("Starting lunar calendar clock...")

    try:
        if USE_FRAMEBUFFER:
            logging.info("Initializing framebuffer...")
            framebuffer_manager = FramebufferManager()
            framebuffer_manager.initialize()

        logging.info("Initializing renderer...")
        renderer = LunarCalendarRenderer(style=load_style(CLOCK_STYLE_PATH))
        clock_manager = ClockDisplayManager(renderer, framebuffer_manager, fps=CLOCK_FPS)
        app.state.clock_manager = clock_manager

        logging.info("Setting up API routes...")
        app.include_router(setup_clock_routes(clock_manager))

        await clock_manager.start()
        logging.info("Lunar calendar clock started successfully!")

    except Exception as e:
        logging.error(f"Failed to start lunar calendar clock: {e}")
        raise

    yield  # Application is running

    # SHUTDOWN
    logging.info("Shutting down lunar calendar clock...")

    try:
        await clock_manager.stop()

        if framebuffer_manager:
            # Leave a blank screen rather than the last frame
            framebuffer_manager.clear_screen()
            framebuffer_manager.cleanup()

        logging.info("Lunar calendar clock shut down successfully!")

    except Exception as e:
        logging.error(f"Error during shutdown: {e}")


# Create FastAPI app with lifespan
app = FastAPI(
    title="Lunar Calendar Clock",
    description="Animated page-flip lunar calendar clock",
    version="1.0.0",
    lifespan=lifespan
)


@app.get("/")
async def index():
    """Redirect to the current frame"""
    return RedirectResponse(url="/clock/frame.png")


if __name__ == "__main__":
    import argparse
    import uvicorn

    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Lunar Calendar Clock - animated calendar display')
    parser.add_argument('--production', action='store_true',
                        help='Run in production mode (port 80)')
    parser.add_argument('--port', type=int, default=None,
                        help='Custom port (overrides --production)')
    parser.add_argument('--no-framebuffer', action='store_true',
                        help='Do not write frames to the framebuffer')
    args = parser.parse_args()

    if args.no_framebuffer:
        USE_FRAMEBUFFER = False

    # Determine port
    if args.port:
        port = args.port
    elif args.production:
        port = PRODUCTION_PORT
    else:
        port = DEFAULT_PORT

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        log_level="info",
    )
