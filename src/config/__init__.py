"""Config — settings por integração e logging estruturado."""
