from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from lessonvault_app import create_app

app = create_app()

if __name__ == '__main__':
    app.run(host=app.config['HOST'], port=app.config['PORT'])
