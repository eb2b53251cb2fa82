# resonance/api/auth/routes.py

import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError
from flask_jwt_extended import jwt_required, get_jwt_identity, create_access_token

from resonance.api.auth.schemas import GoogleLoginSchema, SessionUserSchema
from resonance.services.google_auth_service import GoogleAuthService

auth_bp = Blueprint('auth_bp', __name__)


@auth_bp.route('/google', methods=['POST'])
def google_login():
    """Google credential을 검증하고 세션 토큰과 사용자 정보를 반환합니다. (최초 로그인 시 가입)"""
    auth_service = current_app.services['auth']
    try:
        validated_data = GoogleLoginSchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400

    try:
        google_user_info = GoogleAuthService.verify_credential(
            validated_data['credential'],
            current_app.config['GOOGLE_CLIENT_ID'],
        )
    except ValueError as e:
        logging.warning(f"Google credential 검증 실패: {e}")
        return jsonify({"error_code": "INVALID_CREDENTIAL", "message": "Invalid credential"}), 400

    try:
        user, is_new_user = auth_service.get_or_create_user_by_google(google_user_info)
        token = create_access_token(identity=user.user_id)
        return jsonify({
            "token": token,
            "is_new_user": is_new_user,
            "user": SessionUserSchema().dump(user),
        }), 200
    except Exception as e:
        logging.error(f"Google 로그인 처리 중 예외 발생: {e}", exc_info=True)
        return jsonify({"error_code": "AUTHENTICATION_FAILED", "message": "Authentication failed"}), 500


@auth_bp.route('/verify', methods=['GET'])
@jwt_required()
def verify_session():
    """세션 토큰이 유효하고 계정이 존재하는지 확인합니다."""
    auth_service = current_app.services['auth']
    user_id = get_jwt_identity()
    try:
        user = auth_service.get_user_by_id(user_id)
        if not user:
            return jsonify({"error_code": "USER_NOT_FOUND", "message": "User not found"}), 404
        return jsonify({"user": SessionUserSchema().dump(user)}), 200
    except Exception as e:
        logging.error(f"세션 확인 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to verify session"}), 500


@auth_bp.route('/me', methods=['GET'])
@jwt_required()
def get_current_user():
    """현재 로그인된 사용자 정보를 그대로 반환합니다. (프론트엔드 세션 복원용)"""
    auth_service = current_app.services['auth']
    user_id = get_jwt_identity()
    try:
        user = auth_service.get_user_by_id(user_id)
        if not user:
            return jsonify({"error_code": "USER_NOT_FOUND", "message": "User not found"}), 404
        return jsonify(SessionUserSchema().dump(user)), 200
    except Exception as e:
        logging.error(f"현재 사용자 조회 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to fetch user"}), 500
