# resonance/api/users/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError
from flask_jwt_extended import jwt_required, get_jwt_identity

from resonance.api.users.schemas import UserProfileResponseSchema, UserProfileUpdateSchema

users_bp = Blueprint('users_bp', __name__)


@users_bp.route('/profile', methods=['GET'])
@jwt_required()
def get_my_profile():
    """현재 로그인된 사용자 본인의 프로필을 조회합니다."""
    user_service = current_app.services['users']
    user_id = get_jwt_identity()
    try:
        user = user_service.get_user_by_id(user_id)
        if not user:
            return jsonify({"error_code": "USER_NOT_FOUND", "message": "User not found"}), 404
        return jsonify(UserProfileResponseSchema().dump(user)), 200
    except Exception as e:
        logging.error(f"프로필 조회 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error_code": "PROFILE_FETCH_FAILED", "message": "Failed to fetch profile"}), 500


@users_bp.route('/profile', methods=['PUT'])
@jwt_required()
def update_my_profile():
    """
    현재 로그인된 사용자의 name/avatar를 수정합니다.
    """
    user_service = current_app.services['users']
    user_id = get_jwt_identity()
    try:
        updates = UserProfileUpdateSchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400

    try:
        updated_user = user_service.update_profile(user_id, updates)
        if not updated_user:
            return jsonify({"error_code": "USER_NOT_FOUND", "message": "User not found"}), 404
        return jsonify(UserProfileResponseSchema().dump(updated_user)), 200
    except Exception as e:
        logging.error(f"프로필 수정 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error_code": "PROFILE_UPDATE_FAILED", "message": "Failed to update profile"}), 500


@users_bp.route('/account', methods=['DELETE'])
@jwt_required()
def delete_my_account():
    """
    현재 로그인된 사용자 본인의 계정을 영구적으로 삭제합니다.
    """
    user_service = current_app.services['users']
    user_id = get_jwt_identity()
    try:
        if not user_service.delete_user_account(user_id):
            return jsonify({"error_code": "USER_NOT_FOUND", "message": "User not found"}), 404
        return jsonify({"message": "Account deleted"}), 200
    except Exception as e:
        logging.error(f"회원 탈퇴 처리 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error_code": "ACCOUNT_DELETION_FAILED", "message": "Failed to delete account"}), 500
