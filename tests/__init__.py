"""hssmodel tests."""
