"""Main entry point: ``python src/main.py`` opens the Kanban board."""
from cli import kanban_main


def main():
    kanban_main()

if __name__ == "__main__":
    main()
