# src/resumehub/routes/resume_routes.py
from flask import Blueprint, jsonify

from ..services import resume_service
from . import get_store, json_body

resumes_bp = Blueprint("resumes", __name__, url_prefix="/api/resumes")


@resumes_bp.route("", methods=["POST"])
def save_resume():
    data = json_body()
    resume = resume_service.upload_resume(
        get_store(), data.get("userId"), data.get("fileName"), data.get("description"), data.get("fileContent")
    )
    return jsonify(resume), 201


@resumes_bp.route("/<resume_id>/archive", methods=["PUT"])
def archive_resume(resume_id):
    resume_service.archive_resume(get_store(), resume_id)
    return jsonify({"message": "Resume archived successfully"}), 200


@resumes_bp.route("/<resume_id>/restore", methods=["PUT"])
def restore_resume(resume_id):
    resume_service.restore_resume(get_store(), resume_id)
    return jsonify({"message": "Resume restored successfully"}), 200


@resumes_bp.route("/<resume_id>", methods=["DELETE"])
def delete_resume(resume_id):
    resume_service.delete_resume_permanently(get_store(), resume_id)
    return jsonify({"message": "Resume deleted permanently"}), 200
