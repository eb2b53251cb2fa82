# resonance/api/emotions/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError
from flask_jwt_extended import jwt_required, get_jwt_identity

from resonance.api.emotions.schemas import EmotionCreateSchema, EmotionResponseSchema
from resonance.utils.pagination import parse_page_params

emotions_bp = Blueprint('emotions_bp', __name__)

FEED_DEFAULT_LIMIT = 20


@emotions_bp.route('', methods=['POST'])
@jwt_required()
def create_emotion():
    """
    새로운 감정 게시물을 생성합니다.
    - 요청 본문은 EmotionCreateSchema에 따라 유효성을 검사합니다.
    - 성공 시, 작성자 정보가 포함된 게시물을 201 Created 상태 코드와 함께 반환합니다.
    """
    emotion_service = current_app.services['emotions']
    user_id = get_jwt_identity()
    try:
        data = EmotionCreateSchema().load(request.get_json(silent=True) or {})
        new_emotion = emotion_service.create_emotion(
            user_id, data['color'], data['pattern'], data['motion_intensity']
        )
        return jsonify(EmotionResponseSchema().dump(new_emotion)), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except ValueError as e:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": {"_schema": [str(e)]}}), 400
    except Exception as e:
        logging.error(f"감정 게시물 생성 중 오류 발생: {e}", exc_info=True)
        return jsonify({"error_code": "EMOTION_CREATION_FAILED", "message": "Failed to create emotion"}), 500


@emotions_bp.route('/feed', methods=['GET'])
@jwt_required()
def get_feed():
    """
    모든 사용자의 감정 게시물 피드를 최신순으로 조회합니다. (page/limit 페이지네이션)
    다음 페이지 여부는 limit보다 적게 받았는지로 판단합니다.
    """
    emotion_service = current_app.services['emotions']
    skip, limit = parse_page_params(request.args, FEED_DEFAULT_LIMIT)
    try:
        emotions = emotion_service.get_feed(skip, limit)
        return jsonify(EmotionResponseSchema(many=True).dump(emotions)), 200
    except Exception as e:
        logging.error(f"감정 피드 조회 중 오류 발생: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to fetch emotion feed"}), 500


@emotions_bp.route('/history', methods=['GET'])
@jwt_required()
def get_history():
    """본인이 작성한 감정 게시물을 최신순으로 최대 50개 조회합니다."""
    emotion_service = current_app.services['emotions']
    user_id = get_jwt_identity()
    try:
        emotions = emotion_service.get_history(user_id)
        return jsonify(EmotionResponseSchema(many=True).dump(emotions)), 200
    except Exception as e:
        logging.error(f"감정 히스토리 조회 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to fetch emotion history"}), 500


@emotions_bp.route('/<string:emotion_id>', methods=['GET'])
@jwt_required()
def get_emotion(emotion_id: str):
    """
    특정 감정 게시물의 상세 정보를 조회합니다.
    """
    emotion_service = current_app.services['emotions']
    try:
        emotion = emotion_service.get_emotion_by_id(emotion_id)
        if not emotion:
            return jsonify({"error_code": "EMOTION_NOT_FOUND", "message": "Emotion not found"}), 404
        return jsonify(EmotionResponseSchema().dump(emotion)), 200
    except Exception as e:
        logging.error(f"감정 게시물 조회 중 오류 발생 (emotion_id: {emotion_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to fetch emotion"}), 500


@emotions_bp.route('/<string:emotion_id>', methods=['DELETE'])
@jwt_required()
def delete_emotion(emotion_id: str):
    """
    특정 감정 게시물을 삭제합니다. (작성자 본인만 가능)
    없는 게시물과 타인의 게시물은 같은 404 응답을 받습니다.
    """
    emotion_service = current_app.services['emotions']
    user_id = get_jwt_identity()
    try:
        if not emotion_service.delete_emotion(emotion_id, user_id):
            return jsonify({
                "error_code": "NOT_FOUND_OR_UNAUTHORIZED",
                "message": "Emotion not found or unauthorized",
            }), 404
        return jsonify({"message": "Emotion deleted successfully"}), 200
    except Exception as e:
        logging.error(f"감정 게시물 삭제 중 오류 발생 (emotion_id: {emotion_id}): {e}", exc_info=True)
        return jsonify({"error_code": "EMOTION_DELETION_FAILED", "message": "Failed to delete emotion"}), 500
