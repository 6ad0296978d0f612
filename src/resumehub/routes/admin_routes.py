# src/resumehub/routes/admin_routes.py
from flask import Blueprint, jsonify

from ..services import resume_service, user_service
from . import get_hasher, get_store, json_body

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")


@admin_bp.route("/users", methods=["GET"])
def get_all_users():
    return jsonify(user_service.list_users(get_store())), 200


@admin_bp.route("/users/<user_id>", methods=["DELETE"])
def delete_user(user_id):
    deleted = user_service.delete_user_cascade(get_store(), user_id)
    return jsonify({
        "message": "User and all associated resumes deleted successfully",
        "deletedResumes": deleted,
    }), 200


@admin_bp.route("/resumes", methods=["GET"])
def get_all_resumes():
    return jsonify(resume_service.list_active_resumes_with_owners(get_store())), 200


@admin_bp.route("/resumes/<resume_id>/archive", methods=["PUT"])
def admin_archive_resume(resume_id):
    resume_service.archive_resume(get_store(), resume_id)
    return jsonify({"message": "Resume archived successfully"}), 200


@admin_bp.route("/resumes/<resume_id>", methods=["DELETE"])
def admin_delete_resume(resume_id):
    resume_service.delete_resume_permanently(get_store(), resume_id)
    return jsonify({"message": "Resume deleted successfully"}), 200


@admin_bp.route("/status", methods=["GET"])
def admin_status():
    return jsonify(user_service.admin_status(get_store())), 200


@admin_bp.route("/create", methods=["POST"])
def create_admin():
    data = json_body()
    result = user_service.create_admin(
        get_store(), get_hasher(), email=data.get("email"), password=data.get("password"), name=data.get("name")
    )
    return jsonify(result), 201
