# app.py
import logging
import threading
import uuid
from collections import OrderedDict

from flask import Flask, jsonify, request

import responses
from chatbot import ChatBot, Reply, help_lines

logger = logging.getLogger(__name__)


class SessionRegistry:
    """One SessionState per client; the ChatBot and its content are shared.

    Holds at most max_sessions states; the least recently used one is
    dropped when a new session would exceed the limit.
    """

    def __init__(self, bot: ChatBot, max_sessions=200):
        self.bot = bot
        self.max_sessions = max_sessions
        self._sessions = OrderedDict()
        self._lock = threading.Lock()

    def get_or_create(self, session_id=None):
        with self._lock:
            if isinstance(session_id, str) and session_id in self._sessions:
                self._sessions.move_to_end(session_id)
                return session_id, self._sessions[session_id]
            session_id = uuid.uuid4().hex
            state = self.bot.start_session()
            self._sessions[session_id] = state
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("session %s evicted", evicted)
            return session_id, state

    def get(self, session_id):
        if not isinstance(session_id, str):
            return None
        with self._lock:
            return self._sessions.get(session_id)

    def discard(self, session_id):
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self):
        with self._lock:
            return len(self._sessions)


def create_app(bot=None, max_sessions=200):
    app = Flask(__name__)
    registry = SessionRegistry(bot or ChatBot(), max_sessions=max_sessions)
    app.config["SESSIONS"] = registry

    @app.route('/get', methods=['POST'])
    def get_bot_response():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        message = data.get('message', '')
        session_id, state = registry.get_or_create(data.get('session_id'))
        if not isinstance(message, str):
            message = ''

        reply = registry.bot.respond(message, state)
        if reply is None:
            reply = Reply([responses.empty_message])

        payload = reply.to_dict()
        if not state.running:
            farewell = registry.bot.goodbye(state)
            payload['reply'] = "\n".join(farewell)
            payload['lines'] = farewell
            registry.discard(session_id)
        payload.update({
            'session_id': session_id,
            'running': state.running,
            'mode': 'calculator' if state.in_calculator else 'chat',
        })
        payload.setdefault('action', None)
        return jsonify(payload)

    @app.route('/history', methods=['GET'])
    def history():
        state = registry.get(request.args.get('session_id'))
        if state is None:
            return jsonify({'history': []})
        return jsonify({'history': list(state.history)})

    @app.route('/help', methods=['GET'])
    def help_listing():
        return jsonify({'help': help_lines()})

    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    # debug True for dev only
    create_app().run(debug=True)
