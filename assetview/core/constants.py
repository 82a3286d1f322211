"""常量定义：集中管理 HTTP 状态码与认证相关的固定取值。"""

HTTP_STATUS_OK = 200
HTTP_STATUS_UNAUTHORIZED = 401

ACCESS_TOKEN_TYPE = "bearer"

PATH_SEPARATOR = "/"
