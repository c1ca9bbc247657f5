"""Build the Endorser & GDP Map as a standalone HTML page"""
import logging

from config import Config
from config_validator import MapSettings
from utils.map_generator import MapGenerator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(config=Config):
    """Main entry point"""
    try:
        settings = MapSettings.from_config(config)
        logger.info(
            f"Building map from {settings.gdp_source} and {settings.endorser_source}"
        )

        generator = MapGenerator(config=config)
        m = generator.build_from_sources()
        output = generator.save(m, settings.output_path)

        logger.info(f"Map complete. Open {output} in a browser")
        return output

    except Exception as e:
        logger.error(f"Application error: {e}")
        raise


if __name__ == "__main__":
    main()
