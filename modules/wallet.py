from decimal import Decimal

from eth_account import Account
from web3 import Web3
from web3.exceptions import TimeExhausted
from web3.middleware import ExtraDataToPOAMiddleware

from modules.config import ChainTarget, logger


class TransactionError(Exception):
    pass


class Wallet:
    def __init__(self, private_key, chain: ChainTarget, counter=None, proxy=None):
        self.private_key = private_key
        self.account = Account.from_key(private_key)
        self.address = self.account.address

        self.chain = chain
        request_kwargs = {"timeout": 60}
        if proxy:
            request_kwargs["proxies"] = {"http": proxy, "https": proxy}

        self.web3 = Web3(Web3.HTTPProvider(chain.rpc, request_kwargs=request_kwargs))
        self.explorer = chain.explorer

        self.counter = counter
        self.label = f"{self.counter} {self.address} |" if counter else f"{self.address} |"

        self.web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    def to_checksum(self, address):
        return self.web3.to_checksum_address(address)

    def get_contract(self, address, abi):
        return self.web3.eth.contract(address=self.to_checksum(address), abi=abi)

    def get_native_balance(self) -> Decimal:
        balance = self.web3.eth.get_balance(self.address)
        return Web3.from_wei(balance, "ether")

    def get_tx_data(self, value=0, **kwargs):
        return {
            "chainId": self.chain.chain_id,
            "from": self.address,
            "nonce": self.web3.eth.get_transaction_count(self.address),
            "value": value,
            **kwargs,
        }

    def send_tx(self, tx, tx_label="") -> str:
        """Signs, sends and waits for the receipt. Returns the tx hash."""
        signed_tx = self.web3.eth.account.sign_transaction(tx, self.private_key)

        tx_hash = self.web3.eth.send_raw_transaction(signed_tx.raw_transaction)
        tx_hash_hex = self.web3.to_hex(tx_hash)
        logger.info(f"{tx_label} | {self.explorer}/tx/{tx_hash_hex}")

        try:
            tx_receipt = self.web3.eth.wait_for_transaction_receipt(tx_hash, timeout=400)
        except TimeExhausted as error:
            # Already broadcast, it may still get mined
            raise TransactionError(
                f"{tx_label} | Tx {tx_hash_hex} sent but not confirmed in time: {error}"
            ) from error

        if tx_receipt.status != 1:
            raise TransactionError(f"{tx_label} | Tx {tx_hash_hex} reverted")

        logger.success(f"{tx_label} | Tx confirmed")
        return tx_hash_hex
