"""
================================================================================
Autotest Tools
================================================================================

Support utilities for the UI automation suite.

Modules:
    - common: Shared configuration and logging utilities
    - report_tools: Allure attachment helpers and report processing

Example:
    from autotest_tools.common import get_config, init_logger
    from autotest_tools.report_tools.allure_utils import AllureReportProcessor

    init_logger()
    processor = AllureReportProcessor(Path("reports/allure-results"))
    processor.print_summary()

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
