import hashlib
import json
import os
import re

import boto3

_STACK_TAG = None

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class CdkUtils():

    @staticmethod
    def get_project_settings():
        filename = os.path.join(PROJECT_ROOT, "cdk.json")
        with open(filename, 'r') as cdk_json:
            data = cdk_json.read()
        return json.loads(data).get("projectSettings")

    @staticmethod
    def slugify(value: str) -> str:
        return re.sub(
            r"""[^a-zA-Z0-9-]""",
            r"""-""",
            value
        ).strip("-")

    @staticmethod
    def stack_tag() -> str:
        """The stack tag differentiates between instances of the same stack
        deployed into one account, e.g. one per developer.  It is taken from
        the STACK_TAG environment variable or, when that is not set, from the
        user name of the caller's AWS identity.
        """

        # The stack tag only needs to be determined once.  From then on we use
        # the global variable _STACK_TAG to contain the value.
        global _STACK_TAG

        if _STACK_TAG is None:
            if "STACK_TAG" in os.environ:
                _STACK_TAG = CdkUtils.slugify(os.environ["STACK_TAG"])
            else:
                # arn:aws:iam::123456789012:user/jane or
                # arn:aws:sts::123456789012:assumed-role/role-name/session
                caller_arn = boto3.client('sts').get_caller_identity()['Arn']
                _STACK_TAG = CdkUtils.slugify(caller_arn.split(":")[-1].split("/")[-1])

        return _STACK_TAG

    @staticmethod
    def user_account_scoped_stack_name(base_name: str) -> str:
        return f"{base_name}-{CdkUtils.stack_tag()}"

    @staticmethod
    def directory_hash(path: str) -> str:
        """Stable hash of the files under path, used to detect code changes."""
        digest = hashlib.sha256()
        for root, dirs, files in os.walk(path):
            dirs[:] = sorted(d for d in dirs if d != "__pycache__")
            for name in sorted(files):
                if name.endswith(".pyc"):
                    continue
                file_path = os.path.join(root, name)
                digest.update(os.path.relpath(file_path, path).encode("utf-8"))
                with open(file_path, 'rb') as fp:
                    digest.update(fp.read())
        return digest.hexdigest()
