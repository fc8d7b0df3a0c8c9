"""Round-based item-routing simulation between monkeys."""
