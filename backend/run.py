from buzzer import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, host=app.config['BUZZER_HOST'], port=app.config['BUZZER_PORT'], debug=True)
