# src/resumehub/routes/user_routes.py
from flask import Blueprint, jsonify

from ..services import resume_service, user_service
from . import get_hasher, get_store, json_body

users_bp = Blueprint("users", __name__, url_prefix="/api/users")


@users_bp.route("/register", methods=["POST"])
def register_user():
    data = json_body()
    user = user_service.register_user(
        get_store(), get_hasher(), data.get("name"), data.get("email"), data.get("password")
    )
    return jsonify(user), 201


@users_bp.route("/login", methods=["POST"])
def login_user():
    data = json_body()
    user = user_service.authenticate(get_store(), get_hasher(), data.get("email"), data.get("password"))
    return jsonify(user), 200


@users_bp.route("/<user_id>/resumes", methods=["GET"])
def get_user_resumes(user_id):
    return jsonify(resume_service.list_active_resumes(get_store(), user_id)), 200


@users_bp.route("/<user_id>/resumes/archived", methods=["GET"])
def get_archived_resumes(user_id):
    return jsonify(resume_service.list_archived_resumes(get_store(), user_id)), 200
