"""Entry point - launches the pygame tour host.

Usage:
    python main.py                      # Launch with tour_storage.json beside the project
    python main.py path/to/storage.json # Launch with a custom storage file
"""

import sys


def main():
    args = sys.argv[1:]
    if args and args[0] in ("-h", "--help"):
        print(__doc__)
        sys.exit(0)
    storage_path = args[0] if args else None
    try:
        print("[main] importing App")
        from client.app import main as app_main
        print("[main] starting run loop")
        app_main(storage_path)
        print("[main] run loop ended")
    except Exception:
        import traceback
        print(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
