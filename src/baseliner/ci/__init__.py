# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration module for baseliner.

Maps baseline results to exit codes so pipelines can fail only on new issues.
"""

from baseliner.ci.exit_codes import BaselineExitCode, result_to_exit_code

__all__ = [
    "BaselineExitCode",
    "result_to_exit_code",
]
