from flask_cors import CORS
from flask_socketio import SocketIO

cors = CORS()
# async_mode comes from the config in create_app (eventlet by default)
socketio = SocketIO()
