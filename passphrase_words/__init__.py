# Default word lists, one file per WordCategory
