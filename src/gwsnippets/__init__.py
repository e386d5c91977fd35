"""
Sample snippets for the Google Work Space APIs using the Python client.
Each snippet in gwsnippets.snippets is a standalone example: get an authenticated
service, build one request, send it and hand back the interesting bit of the response.

Python dataclasses are used for the request/response structs and most of the logic is
translating between those and the raw dicts the client wants.

Slides, Sheets, Drive and Chat are covered.  Drive and Chat are tiny so the operations
are plain functions or methods on the dataclass.  Slides and Sheets have the batchUpdate
request chains.  gwsnippets.helpers has the test helper that creates throwaway files and
removes them again.
"""
