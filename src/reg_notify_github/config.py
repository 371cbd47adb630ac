import os
import dotenv
import logging

dotenv.load_dotenv()

OVERRIDE_LOGGING = logging.getLevelName(os.environ.get("OVERRIDE_LOGGING", "INFO"))

DRY_RUN = os.environ.get("DRY_RUN", "false") == "true"

REG_GH_APP_ENDPOINT = os.environ.get("REG_GH_APP_ENDPOINT")

REQUEST_TIMEOUT = os.environ.get("REQUEST_TIMEOUT")
if REQUEST_TIMEOUT is not None:
    REQUEST_TIMEOUT = float(REQUEST_TIMEOUT)

PUSH_GATEWAY = os.environ.get("PUSH_GATEWAY")


# read at notify time, CI exports these per commit
def commit_sha():
    return os.environ.get("COMMIT_INFO_SHA")


def commit_branch():
    return os.environ.get("COMMIT_INFO_BRANCH")
