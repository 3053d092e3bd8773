import logging

from textual.logging import TextualHandler

from .UI import UI
from .config import loadSettings
from .secret_source_numpy import SecretSourceNumpy

def main() -> None:
    settings = loadSettings()
    logging.basicConfig(
        level=settings.log_level, 
        handlers=[TextualHandler()], 
    )
    app = UI(
        source=SecretSourceNumpy(settings.seed),
        tick_seconds=settings.tick_seconds,
    )
    app.run()

if __name__ == '__main__':
    main()
