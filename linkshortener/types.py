from typing import Any


# Type aliases for the code -> destination mapping
type LinkTable = dict[str, str]

# Type aliases for HTTP-level request/response dictionaries
type HttpEvent = dict[str, Any]
type HttpResponse = dict[str, Any]
type HttpHeaders = dict[str, str]
type AppConfiguration = dict[str, Any]
