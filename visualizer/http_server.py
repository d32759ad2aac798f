#!/usr/bin/env python3
"""
HTTP Server for a running elevator bank
Exposes the dispatcher operations and elevator snapshots as a JSON API
"""
import logging
from contextlib import nullcontext

from flask import Flask, jsonify, request
from flask_cors import CORS

from controller.dispatcher import Dispatcher
from controller.errors import DispatchError, ElevatorNotFoundError

logger = logging.getLogger(__name__)


def create_app(dispatcher: Dispatcher, lock=None) -> Flask:
    """
    Build the Flask application around a dispatcher

    Args:
        dispatcher: Dispatcher to expose
        lock: Lock held around every dispatcher call (RealtimeEnvironment.lock
            when the simulation runs on another thread)
    """
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes
    guard = lock if lock is not None else nullcontext()

    def _int_field(payload: dict, name: str) -> int:
        value = payload.get(name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"'{name}' must be an integer")
        return value

    @app.errorhandler(ElevatorNotFoundError)
    def handle_not_found(error):
        return jsonify({'error': str(error)}), 404

    @app.errorhandler(DispatchError)
    def handle_dispatch_error(error):
        return jsonify({'error': str(error)}), 400

    @app.errorhandler(ValueError)
    def handle_bad_request(error):
        return jsonify({'error': str(error)}), 400

    @app.route('/api/status')
    def status():
        """Server status endpoint"""
        with guard:
            elevator_count = len(dispatcher.elevators)
            now = dispatcher.env.now
        return jsonify({
            'status': 'ok',
            'server': 'Elevator Dispatch HTTP Server',
            'version': '1.0',
            'top_floor': dispatcher.top_floor,
            'elevator_count': elevator_count,
            'simulation_time': now
        })

    @app.route('/api/elevators', methods=['GET'])
    def list_elevators():
        with guard:
            snapshots = dispatcher.snapshots()
        return jsonify([snapshot.to_dict() for snapshot in snapshots])

    @app.route('/api/elevators', methods=['POST'])
    def add_elevator():
        with guard:
            elevator_id = dispatcher.add_elevator()
        return jsonify({'elevator_id': elevator_id}), 201

    @app.route('/api/elevators/<int:elevator_id>', methods=['GET'])
    def get_elevator(elevator_id):
        with guard:
            elevator = dispatcher.get_elevator(elevator_id)
            result = elevator.snapshot().to_dict()
            result['pending_floors'] = elevator.pending_floors()
        return jsonify(result)

    @app.route('/api/elevators/<int:elevator_id>/operational', methods=['PUT'])
    def set_operational(elevator_id):
        payload = request.get_json(silent=True) or {}
        operational = payload.get('operational')
        if not isinstance(operational, bool):
            raise ValueError("'operational' must be true or false")
        with guard:
            dispatcher.set_elevator_operational(elevator_id, operational)
        return jsonify({'elevator_id': elevator_id, 'operational': operational})

    @app.route('/api/hall_call', methods=['POST'])
    def hall_call():
        payload = request.get_json(silent=True) or {}
        floor = _int_field(payload, 'floor')
        direction = payload.get('direction')
        with guard:
            elevator_id = dispatcher.hall_call(floor, direction)
        return jsonify({'floor': floor, 'direction': str(direction).upper(), 'elevator_id': elevator_id})

    @app.route('/api/car_call', methods=['POST'])
    def car_call():
        payload = request.get_json(silent=True) or {}
        floor = _int_field(payload, 'floor')
        elevator_id = _int_field(payload, 'elevator_id')
        with guard:
            dispatcher.car_call(floor, elevator_id)
        return jsonify({'floor': floor, 'elevator_id': elevator_id})

    return app


def run_server(dispatcher: Dispatcher, host='localhost', port=5000, lock=None, debug=False):
    """Run the Flask server"""
    logger.info("Starting HTTP server on http://%s:%d", host, port)
    print(f"Starting HTTP server on http://{host}:{port}")
    print("API endpoints:")
    print("  - GET  /api/status")
    print("  - GET  /api/elevators")
    print("  - POST /api/elevators")
    print("  - GET  /api/elevators/<id>")
    print("  - PUT  /api/elevators/<id>/operational")
    print("  - POST /api/hall_call")
    print("  - POST /api/car_call")

    app = create_app(dispatcher, lock=lock)
    # The simulation runs on its own thread; the reloader would start a second one
    app.run(host=host, port=port, debug=debug, use_reloader=False, threaded=True)
