# resonance/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정 / DB
from resonance.core.config import config_by_name, REQUIRED_SETTINGS
from resonance.core import database
from resonance.core.security import register_jwt_handlers

# - API 블루프린트
from resonance.api.auth.routes import auth_bp
from resonance.api.emotions.routes import emotions_bp
from resonance.api.signals.routes import signals_bp
from resonance.api.users.routes import users_bp

# - 서비스 모듈
from resonance.api.auth.services import AuthService
from resonance.api.users.services import UserService
from resonance.api.emotions.services import EmotionService
from resonance.api.signals.services import SignalService


def create_app(config_name=None, test_config=None, db=None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' | 'testing' | 'production' (기본값: FLASK_ENV)
    :param test_config: 설정 클래스 위에 덮어쓸 값 (테스트용)
    :param db: 이미 준비된 pymongo Database 핸들 (주입 시 MONGO_URI 불필요)
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if test_config:
        app.config.from_mapping(test_config)
    app.json.ensure_ascii = False

    # 필수 설정 검증 (기본값으로 대체하지 않고 즉시 실패)
    required = list(REQUIRED_SETTINGS)
    if db is None:
        required.append('MONGO_URI')
    missing = [key for key in required if not app.config.get(key)]
    if missing:
        raise RuntimeError(f"필수 설정 값이 없습니다: {', '.join(missing)}")

    # =====================================================================================
    # 4. 확장 기능 및 외부 서비스 초기화
    # =====================================================================================
    jwt = JWTManager(app)
    register_jwt_handlers(jwt)

    origins = [o.strip() for o in app.config['CORS_ORIGINS'].split(',') if o.strip()]
    CORS(app, resources={r"/api/*": {"origins": origins or "*"}})

    if db is None:
        db = database.connect(app.config['MONGO_URI'], app.config.get('MONGO_DB_NAME'))
    database.ensure_indexes(db)
    app.db = db

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}
    app.services['auth'] = AuthService(db)
    app.services['users'] = UserService(db)
    app.services['emotions'] = EmotionService(db, user_service=app.services['users'])
    app.services['signals'] = SignalService(db, user_service=app.services['users'])

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(emotions_bp, url_prefix='/api/emotions')
    app.register_blueprint(signals_bp, url_prefix='/api/signals')
    app.register_blueprint(users_bp, url_prefix='/api/users')

    @app.route('/', methods=['GET'])
    def health():
        return jsonify({"message": "Resonance API is running"}), 200

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        # 404(없는 경로), 405(허용되지 않은 메서드) 등은 상태 코드를 그대로 유지
        response = {"error_code": "HTTP_ERROR", "message": err.description}
        return jsonify(response), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "An unexpected server error occurred."}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
