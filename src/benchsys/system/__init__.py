"""Host system detection: OS family, CPU model, memory and runtime versions."""
