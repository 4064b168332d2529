LOG_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
