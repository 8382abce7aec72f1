# logger_setup.py

import logging
import os
from datetime import datetime

LOGGER_NAME = "doom_fire"
LOG_FILE_NAME = 'fire.log'


def _close_handlers(logger: logging.Logger):
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def setup_logging(config: dict, log_root: str = 'runs') -> str:
    """
    Routes the fire animation's log records to the terminal and to a per-run
    log file.

    Every run of the animation gets its own directory under `log_root`,
    named after the run id, so the resize, parameter-change and tick-stats
    records of separate sessions never interleave. Only the "doom_fire"
    logger is configured; SDL and Numba chatter stays out of the file.

    Data Contract:
    - Inputs:
        - config (dict): The merged configuration. Reads 'run_id' and the
          'logging' section ('level', 'format').
        - log_root (str): Directory that holds one subdirectory per run.
    - Outputs: The path of the run's log file.
    - Side Effects:
        - Replaces (and closes) any handlers from an earlier call.
        - Creates the run directory.
    - Invariants: A missing run_id becomes the start timestamp, e.g. 20261019-153000.
    """
    run_id = config.get('run_id') or datetime.now().strftime('%Y%m%d-%H%M%S')
    log_config = config['logging']

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_config['level'])
    # Records stop here; the root logger belongs to the libraries
    logger.propagate = False

    run_dir = os.path.join(log_root, run_id)
    os.makedirs(run_dir, exist_ok=True)
    log_file = os.path.join(run_dir, LOG_FILE_NAME)

    formatter = logging.Formatter(log_config['format'])
    handlers = [logging.FileHandler(log_file), logging.StreamHandler()]

    # A second call (tests, restarts) must not duplicate every record
    _close_handlers(logger)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Fire log for run {run_id} at {log_file} (level {log_config['level']}).")
    return log_file
