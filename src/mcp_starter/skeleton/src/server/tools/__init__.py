"""Tools served by ${PROJECT_NAME}."""
