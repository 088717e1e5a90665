"""AWS Lambda handler for the image metadata function."""

from mangum import Mangum

from imagefn.main import app

# Lifespan events don't apply to Lambda's per-invocation model
handler = Mangum(app, lifespan="off")
