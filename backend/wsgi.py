import os
from wiki import create_app

app = create_app(os.getenv("FLASK_CONFIG", "production"))

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8080")))
