"""
AWS Lambda entrypoint.

Same routes as the uvicorn server, built in serverless mode: strict origin
checks by default and no /health route. Point the Lambda handler setting at
contact_relay.lambda_handler.handler.
"""

from dotenv import load_dotenv
from mangum import Mangum

from contact_relay.core.config import get_settings
from contact_relay.factory import configure_logging, create_app

load_dotenv()
configure_logging(get_settings())

app = create_app(deployment_mode="serverless")

# The shared notification client has to outlive each invocation
handler = Mangum(app, lifespan="off")
