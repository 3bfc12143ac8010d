from flask import request

from healthstack.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from healthstack.schemas.auth_schema import LoginSchema, RegisterSchema
from healthstack.services.auth_service import authenticate, get_user, register_user
from healthstack.utils.auth import create_token
from healthstack.utils.http import json_body, ok, validate_schema


def register_handler():
    data, errors = validate_schema(RegisterSchema, json_body())
    if errors:
        raise ValidationError("Validation failed", details=errors)

    user = register_user(data["email"], data["password"], data["name"])
    if user is None:
        raise ConflictError("User with this email already exists")

    return ok({
        "message": "User registered successfully",
        "user": user.to_dict(),
        "token": create_token(user.id, user.email),
    }, 201)


def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        raise ValidationError("Validation failed", details=errors)

    user = authenticate(data["email"], data["password"])
    if user is None:
        raise AuthenticationError("Invalid email or password")

    return ok({
        "message": "Login successful",
        "user": user.to_dict(),
        "token": create_token(user.id, user.email),
    })


def me_handler():
    user = get_user(request.user_id)
    if user is None:
        raise NotFoundError("User not found")
    return ok({"user": user.to_dict()})


def logout_handler():
    """
    Tokens are stateless; the client logs out by discarding its token.
    This endpoint only confirms the action.
    """
    return ok({"message": "Logged out successfully"})
