"""
Azure Functions entry point.

The Functions host discovers `app` in this module. The FastAPI app is
served as-is; host.json clears the route prefix so the public path of the
smmsg function is /api/smmsg.
"""

import azure.functions as func

from smmsg.main import app as fastapi_app

app = func.AsgiFunctionApp(
    app=fastapi_app,
    http_auth_level=func.AuthLevel.ANONYMOUS,
    function_name="smmsg",
)
