import os
import logging
from mcp_server import mcp
import figma_tools  # noqa: F401  registers the tools on `mcp`


def main():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
