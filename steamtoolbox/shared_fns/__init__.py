from .shared_fns import convert_to_numpy, process_output, log_mean_temp_diff, format_warning, WARNING_MESSAGES
