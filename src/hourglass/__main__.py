# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Report the time source configured in the environment.

Usage:
    TIME_SOURCE=test TIME_START=2024-01-01T00:00:00Z python -m hourglass

Prints one JSON document to stdout.

Exit codes:
    0: Success
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import sys

from hourglass.safe import SafeTimeProvider
from hourglass.schema import SYSTEM_SOURCE, TEST_SOURCE, TimeStatusSchema


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        provider = SafeTimeProvider.from_env()
        is_test = provider.is_test_mode()
        status = TimeStatusSchema(
            success=True,
            mode=TEST_SOURCE if is_test else SYSTEM_SOURCE,
            is_test=is_test,
            now=provider.now(),
        )
        print(status.model_dump_json())
        return 0

    except Exception as e:
        # Ensure we always output valid JSON, even on unexpected errors
        error_status = TimeStatusSchema(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
        )
        print(error_status.model_dump_json())
        return 1


if __name__ == "__main__":
    sys.exit(main())
