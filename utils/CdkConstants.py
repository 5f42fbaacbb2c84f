class CdkConstants():

    ### CUSTOM RESOURCE TYPES ###
    HELLO_WORLD_RESOURCE_TYPE = "Custom::HelloWorldResource"

    ### CUSTOM RESOURCE STACK OUTPUT NAMES ###
    HELLO_WORLD_FUNCTION_ARN = "helloWorldFunctionArn"
    CUSTOM_RESOURCE_PROVIDER_FUNCTION_ARN = "customResourceProviderFunctionArn"
    HELLO_WORLD_RESOURCE_OUTPUT = "helloWorldResourceOutput"

    ### LAMBDA HANDLERS ###
    HELLO_WORLD_HANDLER = "hello_world.lambda_handler"
    CUSTOM_RESOURCE_PROVIDER_HANDLER = "runtime.entry_point.lambda_handler"
