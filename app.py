import os

from api import create_app
from blur.config import get_preset, DEFAULT_PRESET
from calibration.baseline_store import SQLiteStore
from realtime.controller import EyeProtectionController
from utils.logging_config import setup_logging, level_from_env

if __name__ == "__main__":
    data_dir = os.environ.get("WISCREEN_DATA_DIR", "data")
    logger = setup_logging(level_from_env(), data_dir=data_dir)

    store = SQLiteStore(data_dir)
    preset = os.environ.get("WISCREEN_BLUR_PRESET", DEFAULT_PRESET)
    controller = EyeProtectionController(store, blur_config=get_preset(preset))
    logger.info("Using blur preset %s, baseline %.4f", preset, controller.state.baseline)

    app = create_app(controller)
    app.run(
        host=os.environ.get("WISCREEN_HOST", "127.0.0.1"),
        port=int(os.environ.get("WISCREEN_PORT", "5001")),
    )
