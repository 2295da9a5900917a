# Directory: /
# Filename: keypad_toolkit.py

import logging
import sys
import os

# --- Path Setup ---
PROJECT_ROOT_FOR_GLOBAL = os.path.dirname(os.path.abspath(__file__))
if PROJECT_ROOT_FOR_GLOBAL not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_FOR_GLOBAL)

# --- LOAD SETTINGS AND SETUP LOGGING FIRST ---
settings = None
try:
    from utils.config.solver_settings import load_solver_settings
    from utils.logging_config import setup_logging
    settings = load_solver_settings()
    setup_logging(settings)
except Exception as e_log_setup:
    # Basic fallback logging if settings or setup_logging fail
    logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logging.getLogger().critical(f"Failed to load settings or run setup_logging: {e_log_setup}. Using basic logging.", exc_info=True)

global_toolkit_logger = logging.getLogger("KeypadToolkit")

# --- IMPORT SOLVER ---
try:
    from controllers.chain_composer import ChainComposer
except ImportError as e_import:
    global_toolkit_logger.critical(f"Import Error for ChainComposer: {e_import}. Ensure paths are correct.", exc_info=True)
    raise

# --- Instantiate the Global Composer ---
composer = None
try:
    composer = ChainComposer(logger_instance=global_toolkit_logger.getChild("Composer"))
    global_toolkit_logger.debug("Global composer initialized.")
except Exception as e_composer_create:
    global_toolkit_logger.critical(f"Failed to create global 'composer' instance: {e_composer_create}", exc_info=True)


def get_composer():
    if composer is None:
        raise RuntimeError("Global 'composer' was not successfully initialized.")
    return composer


def get_settings():
    if settings is None:
        raise RuntimeError("Global 'settings' were not successfully loaded.")
    return settings


# To test this file directly (optional, mainly for checking imports and initializations)
if __name__ == "__main__":
    global_toolkit_logger.info("Testing keypad_toolkit.py directly...")
    if composer:
        global_toolkit_logger.info(f"Global 'composer' available. Sample '029A' at depth 2: {composer.shortest_sequence_length('029A', 2)} presses.")
    else:
        global_toolkit_logger.error("Global 'composer' instance is None.")
    global_toolkit_logger.info("Exiting keypad_toolkit.py direct test.")
