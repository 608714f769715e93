import os
from pathlib import Path

from libb import Setting, expandabspath

Setting.unlock()

# Environment
HERE = Path(Path(__file__).parent).resolve()

# Logger defaults
logger = Setting()
logger.driver = os.getenv('CONFIG_LOGGER_DRIVER', 'file')
logger.level = os.getenv('CONFIG_LOGGER_LEVEL', 'info').lower()
logger.dir = None
if os.getenv('CONFIG_LOGGER_DIR'):
    logger.dir = expandabspath(os.getenv('CONFIG_LOGGER_DIR'))

Setting.lock()
