from flask import Blueprint
from healthstack.controllers.auth_controller import login_handler, register_handler, logout_handler, me_handler
from healthstack.utils.auth import require_auth

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

@auth_bp.post("/register")
def register():
    return register_handler()


@auth_bp.post("/login")
def login():
    return login_handler()


@auth_bp.post("/logout")
def logout():
    return logout_handler()


@auth_bp.get("/me")
@require_auth
def me():
    return me_handler()
