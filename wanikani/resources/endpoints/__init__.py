"""Resource descriptors, one module per API resource group."""
