"""게이트웨이 HTTP 클라이언트 패키지.

Gateway HTTP client package: downstream CRUD services and the identity
provider, both on top of one shared ``httpx.AsyncClient``.
"""
