
CONFIG = {
    "CELL_SIZE": 30,
    "FALL_INTERVAL": 0.5,
    "SOFT_DROP_INTERVAL": 0.05,
    "SEED": None,
    "FPS": 60,
    "LOG_LEVEL": "WARNING",
}
