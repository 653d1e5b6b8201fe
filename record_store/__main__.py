"""Run the record-store command line tool."""

from record_store.tool.record_store import main

if __name__ == "__main__":
    main()
