import sys

from taminal.cli_shell import main as cli_main


def main():
    # Modes:
    # - default: interactive terminal shell
    # - --gui: PySide6 window sharing the same engine
    argv = sys.argv[1:]
    if "--gui" in argv:
        from taminal.ui.app import main as gui_main

        return gui_main([sys.argv[0], *[a for a in argv if a != "--gui"]])
    return cli_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
