"""Testing – fakes and property-based strategies for tableview consumers."""
