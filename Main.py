# main.py
import logging
import os
import traceback

from viz_config import ControlConfig
from viz_main import run_viewer
from viz_world import build_demo_world


def main():
    logging.basicConfig(
        level=os.environ.get("ORBIT_VIEWER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = ControlConfig.from_env()
        world = build_demo_world()

        print("Scene initialized")
        print("Starting viewer...")
        run_viewer(world, config)
        print("Viewer closed")
    except Exception as e:
        print(f"Error occurred: {e}")
        traceback.print_exc()
        raise SystemExit(1)


if __name__ == "__main__":
    main()
