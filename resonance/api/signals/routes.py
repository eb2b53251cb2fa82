# resonance/api/signals/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError
from flask_jwt_extended import jwt_required, get_jwt_identity

from resonance.api.signals.schemas import SignalCreateSchema, SignalResponseSchema, SignalFeedItemSchema
from resonance.utils.pagination import parse_page_params

signals_bp = Blueprint('signals_bp', __name__)

FEED_DEFAULT_LIMIT = 50


@signals_bp.route('', methods=['POST'])
@jwt_required()
def create_signal():
    """새로운 감정 시그널을 생성합니다."""
    signal_service = current_app.services['signals']
    user_id = get_jwt_identity()
    try:
        data = SignalCreateSchema().load(request.get_json(silent=True) or {})
        new_signal = signal_service.create_signal(
            user_id, data['color'], data['motion'], data['intensity'], data['silence_duration']
        )
        return jsonify(SignalResponseSchema().dump(new_signal)), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except ValueError as e:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": {"_schema": [str(e)]}}), 400
    except Exception as e:
        logging.error(f"시그널 생성 중 오류 발생: {e}", exc_info=True)
        return jsonify({"error_code": "SIGNAL_CREATION_FAILED", "message": "Failed to create signal"}), 500


@signals_bp.route('', methods=['GET'])
@jwt_required()
def get_my_signals():
    """본인이 보낸 시그널을 최신순으로 최대 30개 조회합니다."""
    signal_service = current_app.services['signals']
    user_id = get_jwt_identity()
    try:
        signals = signal_service.get_user_signals(user_id)
        return jsonify(SignalResponseSchema(many=True).dump(signals)), 200
    except Exception as e:
        logging.error(f"시그널 목록 조회 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to fetch signals"}), 500


@signals_bp.route('/feed', methods=['GET'])
@jwt_required()
def get_signal_feed():
    """모든 사용자의 시그널 피드를 최신순으로 조회합니다. 작성자는 아바타만 노출됩니다."""
    signal_service = current_app.services['signals']
    skip, limit = parse_page_params(request.args, FEED_DEFAULT_LIMIT)
    try:
        signals = signal_service.get_feed(skip, limit)
        return jsonify(SignalFeedItemSchema(many=True).dump(signals)), 200
    except Exception as e:
        logging.error(f"시그널 피드 조회 중 오류 발생: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to fetch feed"}), 500


@signals_bp.route('/<string:signal_id>', methods=['DELETE'])
@jwt_required()
def delete_signal(signal_id: str):
    """특정 시그널을 삭제합니다. (작성자 본인만 가능)"""
    signal_service = current_app.services['signals']
    user_id = get_jwt_identity()
    try:
        if not signal_service.delete_signal(signal_id, user_id):
            return jsonify({
                "error_code": "NOT_FOUND_OR_UNAUTHORIZED",
                "message": "Signal not found or unauthorized",
            }), 404
        return jsonify({"message": "Signal deleted"}), 200
    except Exception as e:
        logging.error(f"시그널 삭제 중 오류 발생 (signal_id: {signal_id}): {e}", exc_info=True)
        return jsonify({"error_code": "SIGNAL_DELETION_FAILED", "message": "Failed to delete signal"}), 500
