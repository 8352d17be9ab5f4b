class ErrorCode:
    UNAUTHORIZED = "UNAUTHORIZED"
    COURSE_NOT_FOUND = "COURSE_NOT_FOUND"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    DIRECTORY_NOT_FOUND = "DIRECTORY_NOT_FOUND"
    COURSE_ALREADY_EXISTS = "COURSE_ALREADY_EXISTS"
    CHAPTER_ALREADY_EXISTS = "CHAPTER_ALREADY_EXISTS"
    INVALID_PATH_SEGMENT = "INVALID_PATH_SEGMENT"
    PATH_OUTSIDE_CONTENT_ROOT = "PATH_OUTSIDE_CONTENT_ROOT"
    CATALOG_TIMEOUT = "CATALOG_TIMEOUT"
