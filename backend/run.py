from relay import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Socket.IO server handles the websocket transport in dev
    socketio.run(app, debug=True)
