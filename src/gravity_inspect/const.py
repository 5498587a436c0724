ERRORS = {
  "E_LAYOUT_MISSING": "Account dump file missing",
  "E_DUMP_READ": "Account dump could not be read",
  "E_DUMP_HEX": "Account dump is not valid hex",
  "E_SIZE_MISMATCH": "Account data length does not match contract state layout",
  "E_INIT_FLAG": "is_initialized byte is neither 0 nor 1",
  "E_UNINITIALIZED": "Contract state is not initialized",
}

HEX_SUFFIX = ".hex"
