from decimal import Decimal

from modules.wallet import Wallet

WRAPPED_TOKEN_ABI = [
    {
        "type": "function",
        "name": "deposit",
        "stateMutability": "payable",
        "inputs": [],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "withdraw",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "wad", "type": "uint256"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "balanceOf",
        "stateMutability": "view",
        "inputs": [{"name": "owner", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "decimals",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
    },
]


class Wrapper(Wallet):
    def __init__(self, private_key, chain, counter=None, proxy=None):
        super().__init__(private_key, chain, counter, proxy)
        self.contract = self.get_contract(
            chain.wrapped_token_address, abi=WRAPPED_TOKEN_ABI
        )
        self._decimals = None

    @property
    def decimals(self):
        if self._decimals is None:
            self._decimals = self.contract.functions.decimals().call()
        return self._decimals

    def get_token_balance(self) -> Decimal:
        balance = self.contract.functions.balanceOf(self.address).call()
        return Decimal(balance) / Decimal(10) ** self.decimals

    def to_token_units(self, amount) -> int:
        return int(Decimal(amount) * Decimal(10) ** self.decimals)

    def deposit(self, amount) -> str:
        amount_wei = self.web3.to_wei(Decimal(amount), "ether")

        contract_tx = self.contract.functions.deposit().build_transaction(
            self.get_tx_data(value=amount_wei)
        )

        return self.send_tx(
            contract_tx,
            tx_label=f"{self.label} wrap {amount} {self.chain.token}",
        )

    def withdraw(self, amount) -> str:
        contract_tx = self.contract.functions.withdraw(
            self.to_token_units(amount)
        ).build_transaction(self.get_tx_data())

        return self.send_tx(
            contract_tx,
            tx_label=f"{self.label} unwrap {amount} {self.chain.wrapped_token}",
        )
