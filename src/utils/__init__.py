"""Utils — funções puras e exceções compartilhadas."""
