"""例外クラスを定義するモジュール"""


class InvalidArgumentError(ValueError):
    """引数の前提条件違反を表す例外

    形状の不一致、非正の格子間隔、不正な設定値などで送出されます。
    ValueErrorを継承しているため、既存のValueError処理でも捕捉できます。
    """
