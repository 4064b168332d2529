HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"

MEDIA_TYPE_JSON = "application/json"

URL_SEPARATOR = "/"
