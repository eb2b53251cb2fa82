# resonance/core/security.py
import logging
from flask import jsonify
from flask_jwt_extended import JWTManager


def _unauthenticated(message: str):
    return jsonify({"error_code": "UNAUTHENTICATED", "message": message}), 401


def register_jwt_handlers(jwt: JWTManager) -> None:
    """
    flask-jwt-extended의 인증 실패 응답을 통일합니다.
    헤더 누락, 잘못된 형식, 서명 불일치, 만료 모두 401 UNAUTHENTICATED로 응답합니다.
    (기본 동작은 잘못된 토큰에 422를 반환함)
    """
    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return _unauthenticated("Authorization header is missing or invalid")

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        logging.info(f"유효하지 않은 토큰 거부: {reason}")
        return _unauthenticated("Invalid token")

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return _unauthenticated("Token has expired")
