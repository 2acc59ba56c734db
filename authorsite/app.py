"""
authorsite server
=================

Run with:
    python -m authorsite.app

Or through the Flask CLI:
    flask --app authorsite.app run
    flask --app authorsite.app init-db
"""

from authorsite import create_app

app = create_app()


if __name__ == '__main__':
    port = app.config['PORT']
    print("\n" + "=" * 60)
    print("authorsite backend")
    print("=" * 60)
    print(f"Subscribe:       POST http://localhost:{port}/api/newsletter/subscribe")
    print(f"Contact:         POST http://localhost:{port}/api/contact")
    print(f"Health:          http://localhost:{port}/health")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))
