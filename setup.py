import setuptools


with open("README.md") as fp:
    long_description = fp.read()


setuptools.setup(
    name="lambda_custom_resource",
    version="0.0.1",

    description="CDK app with a Hello World Lambda function and a Lambda backed CloudFormation custom resource.",
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=[
        "stacks",
        "stacks.customresource",
        "utils",
        "client",
    ],
    py_modules=["app"],

    package_data={
        "stacks.customresource": [
            "resources/lambda/hello_world/*.py",
            "resources/lambda/custom_resource_provider/runtime/*.py",
            "resources/lambda/custom_resource_provider/runtime/*/*.py",
        ],
    },

    install_requires=[
        "aws-cdk-lib>=2.100.0,<3.0.0",
        "constructs>=10.0.0,<11.0.0",
        "boto3>=1.26.0",
        "urllib3>=1.26.0",
    ],

    extras_require={
        "test": [
            "pytest>=7.0.0",
            "expects>=0.9.0",
        ],
    },

    python_requires=">=3.9",

    classifiers=[
        "Development Status :: 4 - Beta",

        "Intended Audience :: Developers",

        "Programming Language :: JavaScript",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",

        "Topic :: Software Development :: Code Generators",
        "Topic :: Utilities",

        "Typing :: Typed",
    ],
)
