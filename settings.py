#######################################################################
#                         General Settings                            #
#######################################################################

SHUFFLE_WALLETS = False
USE_PROXY = False

# Network to run on, must be a key of CHAIN_DATA in modules/config.py
CHAIN = "lisk"

#######################################################################
#                        Wrap / Unwrap Settings                       #
#######################################################################

# Transactions per wallet per cycle, picked at random (inclusive)
DAILY_TX_COUNT = [5, 10]

# Amount to wrap or unwrap per transaction, in ETH
TX_AMOUNT = [0.0000001, 0.000001]

# Delay between transactions of one wallet, in milliseconds
TX_DELAY_MS = [30000, 90000]

# Pause after all wallets are done before the next cycle starts
CYCLE_SLEEP_HOURS = 23

#######################################################################
#                        History Settings                             #
#######################################################################

HISTORY_FILE = "reports/transaction_log.json"

# The whole history is reset once its oldest record is older than this
HISTORY_RETENTION_DAYS = 30
