"""
core/domain/messages.py

用户可见的消息文本。HTTP 层原样返回这些字符串，测试也直接断言它们。
"""

INVALID_HOTEL_NAME = "Hotel name must be non-null and non-empty"
INVALID_PRICE = "Price must be greater than zero"
MISSING_HOTEL_ID = "Hotel id must not be null"
INVALID_PRICE_PRECISION = "Price must have at most 8 integer digits and 2 decimal places"

USER_SAVED = "User saved successfully."
USER_ALREADY_EXISTS = "User Already Exists, try with unique usernames."
INVALID_CREDENTIALS = "Invalid username or password"
INVALID_TOKEN = "Invalid or expired token"
TOKEN_VALID = "Token is valid"


def field_too_long(field, limit) -> str:
    return f"{field} must be at most {limit} characters"


def hotel_not_found(hotel_id) -> str:
    return f"Hotel with id {hotel_id} not found"


def hotel_deleted(hotel_id) -> str:
    return f"Hotel with id {hotel_id} has been deleted"


def room_not_found(room_id) -> str:
    return f"Room with id {room_id} not found!"


def room_deleted(room_id) -> str:
    return f"Room with id {room_id} has been deleted!"
