from lightsout import create_app, socketio

app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info(f"Lights Out game server running on port {port}")
    app.logger.info(f"Open http://localhost:{port} to play")
    app.logger.info(f"Stats API available at http://localhost:{port}/api/stats")
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, port=port, debug=True)
