import argparse
import json
from dataclasses import dataclass

from loguru import logger
from rich.console import Console

from omniboard.board import Column, ColumnRegistry, board_summary
from omniboard.utils.logging import setup_logger


@dataclass
class DemoProject:
    name: str
    status: str
    flagged: bool = False

    def __str__(self) -> str:
        return self.name


DEMO_PROJECTS = [
    DemoProject("Write report", "active", flagged=True),
    DemoProject("Plan holiday", "on hold"),
    DemoProject("_template", "active"),
    DemoProject("Fix bike", "active"),
]


def build_demo_board() -> ColumnRegistry:
    """Build a small two-column board from the demo projects."""
    registry = ColumnRegistry()
    registry.configure(
        conditions=lambda p: not p.name.startswith("_"),
        mark_when=lambda p: p.flagged,
    )

    active = Column(
        "Active",
        registry=registry,
        order=1,
        conditions=lambda p: p.status == "active",
    )
    everything = Column(
        "Everything",
        registry=registry,
        order=0,
        group_by=lambda p: p.status,
        display="compact",
    )
    for column in (active, everything):
        column.add(DEMO_PROJECTS)
    return registry


def main():
    parser = argparse.ArgumentParser(description="Build a demo board and print it")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()

    setup_logger(level=args.log_level, use_rich=True)
    registry = build_demo_board()
    logger.info(f"Built board with {len(registry)} columns")
    Console().print_json(json.dumps(board_summary(registry)))


if __name__ == "__main__":
    main()
