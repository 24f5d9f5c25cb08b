"""Package registry domain: records, validation, addressing and transitions."""
