"""Live UI automation for The Internet demo site: framework, page objects, tests and features."""
