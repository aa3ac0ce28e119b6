from issuewatch.main import create_app

app = create_app()
