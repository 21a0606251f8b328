import logging
import threading

from flask import Flask, request, jsonify
from flask_cors import CORS

from blur.mapper import compute_blur
from domain.errors import NotReady
from domain.models import FaceBox, face_ratio
from realtime.controller import EyeProtectionController

logger = logging.getLogger(__name__)


def _json_body():
    """Request JSON as a dict; a missing or empty body counts as {}."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


def _ratio_from_payload(payload):
    """Face ratio from a /api/frame body, or None when the frame had no face."""
    if payload.get('face_ratio') is not None:
        return payload['face_ratio']
    if payload.get('box') is not None:
        try:
            x1, y1, x2, y2 = (float(v) for v in payload['box'])
            width, height = (float(v) for v in payload['frame_size'])
        except (KeyError, TypeError, ValueError):
            raise ValueError("'box' needs four numbers and 'frame_size' needs [width, height]") from None
        return face_ratio(FaceBox(x1, y1, x2, y2), width, height)
    return None


def create_app(controller: EyeProtectionController) -> Flask:
    app = Flask(__name__)
    CORS(app)  # Allow the overlay frontend to call the API

    # The controller is single-threaded; the dev server is not
    lock = threading.Lock()

    @app.errorhandler(NotReady)
    def handle_not_ready(e):
        return jsonify({'error': str(e)}), 409

    @app.errorhandler(ValueError)
    def handle_invalid(e):
        return jsonify({'error': str(e)}), 400

    @app.route('/api/health', methods=['GET'])
    def health():
        return jsonify({'status': 'ok'})

    @app.route('/api/status', methods=['GET'])
    def status():
        with lock:
            return jsonify(controller.snapshot())

    @app.route('/api/frame', methods=['POST'])
    def frame():
        payload = _json_body()
        ratio = _ratio_from_payload(payload)
        with lock:
            if ratio is None:
                blur_state = controller.on_no_face()
            else:
                blur_state = controller.on_face_ratio(ratio)
            return jsonify({'face_detected': ratio is not None, 'blur': blur_state.to_dict()})

    @app.route('/api/calibration/capture', methods=['POST'])
    def capture():
        with lock:
            session = controller.capture()
            return jsonify({
                'count': session.count,
                'complete': session.complete,
                'progress': session.progress_text,
                'phase': controller.phase.value,
                'baseline': controller.state.baseline if session.complete else None,
            })

    @app.route('/api/calibration/reset', methods=['POST'])
    def reset():
        with lock:
            controller.reset()
            return jsonify(controller.snapshot())

    @app.route('/api/eye-mode', methods=['POST'])
    def eye_mode():
        payload = _json_body()
        with lock:
            if 'enabled' in payload:
                if not isinstance(payload['enabled'], bool):
                    return jsonify({'error': "'enabled' must be true or false"}), 400
                controller.set_eye_mode(payload['enabled'])
            else:
                controller.toggle_eye_mode()
            return jsonify({
                'eye_mode': controller.state.eye_mode,
                'blur': controller.blur_state.to_dict(),
            })

    @app.route('/api/blur', methods=['POST'])
    def blur():
        payload = _json_body()
        if 'face_ratio' not in payload or 'baseline' not in payload:
            return jsonify({'error': "'face_ratio' and 'baseline' are required"}), 400
        blur_state = compute_blur(
            payload['face_ratio'],
            payload['baseline'],
            max_ratio=payload.get('max_ratio'),
            config=controller.blur_config,
        )
        return jsonify(blur_state.to_dict())

    return app
