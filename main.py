# Main.py
""""" Entry point for the PEMDAS Calculator.

   Responsibilities:
   - Detect run mode (script vs PyInstaller.exe)
   - Verify required files exist in development mode
   - Start the console shell (--console) or the Qt GUI

"""""
import sys
from pathlib import Path
from PemdasCalc import config_manager as config_manager


# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent


def missing_files(root=None):
    """Return the names of required project files that do not exist under `root`."""
    if root is None:
        root = PROJECT_ROOT

    package_dir = root / "PemdasCalc"

    REQUIRED = [
        package_dir / "MathEngine.py",
        package_dir / "error.py",
        package_dir / "config_manager.py",
        package_dir / "Console.py",
        package_dir / "UI.py",
        root / "config.json",
        package_dir / "ui_strings.json",
    ]

    return [file_path.name for file_path in REQUIRED if not file_path.exists()]


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
      In production (.exe) files are embedded by the bundler, so the check is skipped.
    """

    missing = missing_files()
    if missing:
        print("Error 1000: The following files are missing or in the wrong location:")
        for file_name in missing:
            print(f"- {file_name}")
        sys.exit(1)


def main(argv=None):

    """
    Start the requested front-end.
    - Keep this thin: no business logic here.
    """

    if argv is None:
        argv = sys.argv[1:]

    if config_manager.load_setting_value("debug") == True:
        print("Config loaded:", config_manager.load_setting_value("all"))

    if "--console" in argv or "-c" in argv:
        from PemdasCalc import Console
        return Console.main()

    # The UI owns the event loop; imported lazily so the console works without Qt
    from PemdasCalc import UI
    return UI.main()


if __name__ == "__main__":
    is_running_as_exe = getattr(sys, 'frozen', False)

    if not is_running_as_exe:
        check_files_exist()
    sys.exit(main())
