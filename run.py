from recordsheet import create_cli
from config import Config
import logging

# Create the CLI instance using the factory
cli = create_cli(Config)

if __name__ == '__main__':
    # Set up logging
    logging.basicConfig(level=Config.LOG_LEVEL)

    cli()
