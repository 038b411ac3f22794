"""HTTP boundary of the HR workflow designer."""
