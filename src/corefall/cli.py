"""
Command-line entry point.

Takes no arguments: runs the refinement with the default constants,
prints one line per run and the closing throughput line.
"""
from __future__ import annotations

import sys

from corefall.config import FallConfig
from corefall.core.clock import Clock
from corefall.core.refinement import RefinementDriver
from corefall.report import format_run_line, format_summary_line

EXIT_CODE = 1


def main(config: FallConfig | None = None, clock: Clock | None = None) -> int:
    """
    Run the refinement and print the report.

    Returns the fixed exit status ``EXIT_CODE`` (1). It is returned on
    every completed run and does not signal an error.
    """
    config = config if config is not None else FallConfig()
    driver = RefinementDriver(
        config,
        clock=clock,
        on_run=lambda run: print(format_run_line(run)),
    )
    result = driver.run()
    print(format_summary_line(result.throughput))
    return EXIT_CODE


if __name__ == "__main__":
    sys.exit(main())
