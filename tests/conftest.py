pytest_plugins = ["ioc_kernel.testing.fixtures"]
